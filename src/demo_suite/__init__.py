"""example test cases demonstrating pass, fail and skip outcomes"""

__version__ = "0.1.0"
