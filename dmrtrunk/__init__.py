"""DMR Tier III trunking signalling: CSBK builders, group number conversions and UDP framing."""

__version__ = "0.1.0"

__all__ = ["csbk", "defines", "grants", "network", "replies", "signalling", "utils"]