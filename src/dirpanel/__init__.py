"""
dirpanel - Directory Panel

A sidebar-style directory browser for the terminal.
Sort, filter, walk into folders, step back up, and open files in your editor.

Created: 2026-10-18
"""

__version__ = "0.1.0"
__author__ = "dirpanel contributors"
