# Re-export builders for test modules
from .file_builder import FileBuilder, snapshot_tree
from .mock_builder import FakeCommandRunner

__all__ = ['FileBuilder', 'FakeCommandRunner', 'snapshot_tree']
