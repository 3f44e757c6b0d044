"""
HVAC & Appliance Repair quote site server
"""

__version__ = "1.0.0"
