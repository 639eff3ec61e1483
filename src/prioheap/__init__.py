__version__ = "0.1.0"
__description__ = "Comparator-ordered binary heaps and bounded Top-K selection."
__author__ = "prioheap contributors"
