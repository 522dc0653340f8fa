"""
Concrete tracker operations, one per protocol verb.
"""

from .create_close_operation import CreateCloseOperation
from .create_open_operation import CreateOpenOperation
from .delete_operation import DeleteOperation
from .file_info_operation import FileInfoOperation
from .get_paths_operation import GetPathsOperation
from .list_keys_operation import ListKeysOperation
from .noop_operation import NoopOperation
from .rename_operation import RenameOperation
from .update_storage_class_operation import UpdateStorageClassOperation

__all__ = [
    "CreateCloseOperation",
    "CreateOpenOperation",
    "DeleteOperation",
    "FileInfoOperation",
    "GetPathsOperation",
    "ListKeysOperation",
    "NoopOperation",
    "RenameOperation",
    "UpdateStorageClassOperation",
]
