import sys

from vdi_viewer.main import run

sys.exit(run())
