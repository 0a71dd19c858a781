"""Tree subpackage for topology reconstruction primitives.

Re-exports the public API for the tree module:
- HexKeyNormalizer: the single hex-token -> integer identifier rule
- TreeNode: dataclass representing a node in the reconstructed tree
- NodeRole: StrEnum of the display roles (CCO, PCO, STA)
- TreeBuilder: converts ordered NodeRecords into one rooted TreeNode tree
"""

from route_topo.tree.builder import TreeBuilder, select_root
from route_topo.tree.nodes import NodeRole, TreeNode
from route_topo.tree.normalizer import HexKeyNormalizer

__all__ = ["HexKeyNormalizer", "NodeRole", "TreeBuilder", "TreeNode", "select_root"]
