"""
Constants for TEOS-10 seawater calculations.

Values follow IOC, SCOR and IAPSO (2010), TEOS-10 Manual.
"""

# ============================================================================
# Fundamental Physical Constants
# ============================================================================

R = 8.314472          # Molar gas constant [J mol^-1 K^-1]
T0 = 273.15           # Celsius zero point [K]

# ============================================================================
# Seawater Constants
# ============================================================================

# Mole-weighted average atomic weight of the elements of sea salt
M_S = 0.0314038218    # [kg mol^-1]
