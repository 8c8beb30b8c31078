import logging
import sys

from folio.exporter import export_site
from folio.main import app

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    output_dir = sys.argv[1] if len(sys.argv) > 1 else "dist"
    try:
        written = export_site(app, output_dir)
        logger.info(f"Export completed successfully: {len(written)} files.")
    except Exception as e:
        logger.error(f"Export failed: {e}", exc_info=True)
        sys.exit(1)
