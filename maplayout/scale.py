import math

from reportlab.lib.units import inch

# Constants for coordinate conversion
EARTH_RADIUS = 6371000  # Earth's radius in meters
METERS_PER_DEGREE_LAT = EARTH_RADIUS * (math.pi / 180)  # ~111km per degree

# Canvas units are hundredths of an inch
CANVAS_UNITS_PER_INCH = 100
SQ_CANVAS_UNITS_PER_SQ_INCH = CANVAS_UNITS_PER_INCH**2
CANVAS_UNITS_PER_POINT = CANVAS_UNITS_PER_INCH / inch  # reportlab points are 1/72 inch

# Largest layout allowed, per side of an equivalent square
MAX_SIZE_INCHES = 75

# Reference canvas for fit to page is a 7 by 7 inch square
REFERENCE_CANVAS_INCHES = 7
