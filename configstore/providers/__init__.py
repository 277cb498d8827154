"""
Built-in configuration providers: files, file lists, file trees and
environment variables.
"""

from .decode import decode_items
from .environ import EnvVariableProvider, EnvVariableOptions, with_priority, with_automatic_binding
from .file import FilePoller, DecodeFn, read_file, load_file, load_file_list
from .tree import load_file_tree

__all__ = [
    'decode_items',
    'EnvVariableProvider',
    'EnvVariableOptions',
    'with_priority',
    'with_automatic_binding',
    'FilePoller',
    'DecodeFn',
    'read_file',
    'load_file',
    'load_file_list',
    'load_file_tree'
]
