"""
FlyGuide - nonstop fare finder and travel guide
"""

__version__ = "1.0.0"
