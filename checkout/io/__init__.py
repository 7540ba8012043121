"""
File handling for catalog sources and receipt reports.
"""
