"""
Numerical and display constants for Starling.

This module centralizes the magic numbers shared by the model, the engine
and the presentation layers.

NOTE: Only add constants here that are ACTIVELY IMPORTED elsewhere.
"""

# EDV slider range (mL).
EDV_SLIDER_MIN = 50.0
EDV_SLIDER_MAX = 280.0
INITIAL_EDV = 120.0  # Resting preload

# Inotropy / afterload slider range (% of full shift toward a target regime).
INTENSITY_PERCENT_MIN = -100.0
INTENSITY_PERCENT_MAX = 100.0

# Number of intervals used when sampling a curve (steps + 1 points).
CURVE_STEPS = 100

# Display precision (decimal places) applied at the output boundary only.
EDV_DECIMALS = 1
SV_DECIMALS = 1
CO_DECIMALS = 2
HR_DECIMALS = 0

# mL/beat * beats/min / ML_PER_LITER -> L/min
ML_PER_LITER = 1000.0
