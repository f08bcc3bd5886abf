# Process-wide defaults. Modules read these at call time, so assigning
# e.g. ``settings.HARTMANN_TZENG = True`` affects every later construction.

# Search for a Hartmann-Tzeng refinement of the BCH bound.
# Costs O(n^2 * delta^2) per maximal run.
HARTMANN_TZENG = False

# Check e(x)^2 == e(x) mod x^n - 1 after computing the idempotent.
VERIFY_IDEMPOTENT = False

# joblib worker count for family sweeps (1 runs in-process, -1 uses every core).
FAMILY_N_JOBS = 1
