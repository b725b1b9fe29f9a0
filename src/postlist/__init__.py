"""
postlist - Load blog post metadata from markdown front-matter.

Usage:
    postlist                 # List posts found in ./contents
    postlist --json          # Print the records handed to the renderer
    postlist --init          # Initialize local config
"""

__version__ = "0.1.0"
