"""Per-camera, per-tick fault probabilities and value pools.

Each probability is the chance that a given field of a given camera takes
a faulty value on a single simulation tick.  Every field is rolled
independently, so one camera can go offline, lose its DHCP lease and run
outdated firmware on the same tick.
"""
from __future__ import annotations

# ── Fault injection (per-camera, per-tick) ──────────────────────────
OFFLINE_PROB = 0.03            # 3% chance camera reports offline
DHCP_FAIL_PROB = 0.01          # 1% chance IP falls back to link-local
WRONG_VLAN_PROB = 0.02         # 2% chance VLAN is re-drawn from all known VLANs
OUTDATED_FW_PROB = 0.03        # 3% chance firmware is the outdated build

# ── Address ranges ──────────────────────────────────────────────────
HOST_OCTET_MIN = 1
HOST_OCTET_MAX = 254
HOST_OCTET_SPAN = HOST_OCTET_MAX - HOST_OCTET_MIN + 1  # 254

LINK_LOCAL_PREFIX = "169.254."
LINK_LOCAL_THIRD_OCTET = (0, 255)
LINK_LOCAL_FOURTH_OCTET = (1, 254)

# ── Firmware ────────────────────────────────────────────────────────
OUTDATED_FIRMWARE = "8.0.0"
DEFAULT_APPROVED_FIRMWARE = ("10.12.221", "9.80.5")

# ── Reference site table: name -> (vlan, subnet prefix) ─────────────
DEFAULT_SITE_POLICIES: dict[str, tuple[int, str]] = {
    "T4": (100, "10.51.100."),
    "T5": (200, "10.51.200."),
    "TBIT": (300, "10.51.300."),
}
