"""Shared fixtures: capture text samples and a NodeRecord factory.

Capture samples use the column layout of real PLC topology dumps:
IDX ROLE MAC TEI RO PCO LV NXH RSSI SNR.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from route_topo.records.models import NodeRecord

RecordFactory = Callable[..., NodeRecord]

SAMPLE_CAPTURE = """\
# IDX ROLE  MAC          TEI   RO PCO LV NXH RSSI SNR
0 (CCO) 7cc294ff2501 0x001 1 001 0 000 0 0
1 (PCO) 7cc294ff2572 0x02C 1 001 1 02C -48 31.5
2 (STA) 7cc294ff2580 0x033 1 02C 2 02C -61 22.0
3 (STA) 7cc294ff2591 0x008 1 001 1 008 -55 27.25
"""


@pytest.fixture
def sample_capture() -> str:
    """Four-node capture: CCO -> {0x02C -> 0x033, 0x008}."""
    return SAMPLE_CAPTURE


@pytest.fixture
def make_record() -> RecordFactory:
    """Return a factory building NodeRecords from (index, tei, pco) values."""

    def _make(
        index: int,
        tei: int,
        pco: int,
        *,
        level: int = 0,
        rssi: int = 0,
        snr: float = 0.0,
        role: str = "(O)",
    ) -> NodeRecord:
        tei_text = f"0x{tei:03X}"
        pco_text = f"{pco:03X}"
        return NodeRecord(
            sequence_index=index,
            mac_address=f"7cc294ff{index:04x}",
            identifier_text=tei_text,
            identifier_value=tei,
            role_tag=role,
            ro_flag=1,
            parent_reference_text=pco_text,
            parent_reference_value=pco,
            hierarchy_level=level,
            next_hop="000",
            received_signal_strength=rssi,
            signal_to_noise_ratio=snr,
            raw_line=f"{index} {role} {tei_text} {pco_text}",
        )

    return _make
