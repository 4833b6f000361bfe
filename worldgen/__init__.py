"""Planet-generation building blocks: depression filling, rivers, coast distance, temperature and map-view helpers."""

__version__ = "0.1.0"