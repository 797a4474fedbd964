"""Records of programming languages and programmers in memory, CSV, XML or SQLite storage, with a console menu."""

__version__ = "0.1.0"