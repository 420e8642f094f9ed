"""
Test suite for the layout2pdf project.
"""
