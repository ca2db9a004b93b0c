"""A small interactive command shell with history recall and aliases."""

__version__ = "0.1.0"