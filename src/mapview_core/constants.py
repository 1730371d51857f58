"""Global constants shared by the record, the importer and the codec."""

MINIMUM_ZOOM = 0.0
MAXIMUM_ZOOM = 20.0

# Default chrome offsets, in density-independent pixels.
DIMENSION_SEVEN_DP = 7.0
DIMENSION_TEN_DP = 10.0
DIMENSION_SIXTEEN_DP = 16.0
DIMENSION_SEVENTY_SIX_DP = 76.0

DEFAULT_ACCURACY_ALPHA = 100

# Optional header for versioned binary records.
RECORD_MAGIC = b"MVOP"
RECORD_VERSION = 1
