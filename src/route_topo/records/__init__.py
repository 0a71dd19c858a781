"""Records subpackage: parsed capture lines.

Re-exports the public API for the records module:
- NodeRecord: frozen dataclass for one capture line
- RecordParser: converts capture text into ordered NodeRecords
- make_manual_record / next_sequence_index: hand-entered records
"""

from route_topo.records.manual import make_manual_record, next_sequence_index
from route_topo.records.models import NodeRecord
from route_topo.records.parser import RecordParser

__all__ = ["NodeRecord", "RecordParser", "make_manual_record", "next_sequence_index"]
