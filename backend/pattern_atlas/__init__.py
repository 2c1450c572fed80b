"""Pattern Atlas: runnable object-oriented design pattern catalog"""

__version__ = "0.1.0"
