"""fsclean - Cleans up files on the filesystem.

Deletes files older than a maximum age below a root directory,
optionally removing directories left empty by the cleanup.
"""

import logging

__version__ = "1.0.0"

# Library code stays silent until the CLI attaches real handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())
