"""Read and write the settings, web settings and styles parts of WordprocessingML documents."""

__version__ = "0.1.9"