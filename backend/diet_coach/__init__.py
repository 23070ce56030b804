"""
Diet Coach - meal calorie estimate and coaching backend
"""
__version__ = "1.0.0"
