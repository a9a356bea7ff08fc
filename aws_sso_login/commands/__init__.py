"""
The output modes: shell exports, credential_process JSON, the shared
credentials file and the web console.
"""

from .export import export_credentials
from .process import process_credentials
from .import_creds import import_credentials, write_credentials_file
from .console import open_console

__all__ = [
    'export_credentials',
    'process_credentials',
    'import_credentials',
    'write_credentials_file',
    'open_console',
]
