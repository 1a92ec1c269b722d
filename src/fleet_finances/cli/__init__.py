"""
Command Line Interface Package

`fleet` entry point with configuration commands and the `records` report group.
"""
