"""
Download trigger: saves the poem as a local text file.
"""
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DOWNLOAD_FILENAME = "my-poem.txt"


class PoemDownloader:
    def __init__(self, download_dir: str = "."):
        self.download_dir = Path(download_dir)

    def download(self, text: str, filename: str = DOWNLOAD_FILENAME) -> Path:
        """
        Write text to download_dir/filename, replacing any earlier download.
        
        :return: Path of the written file
        """
        self.download_dir.mkdir(parents=True, exist_ok=True)
        target = self.download_dir / filename
        target.write_text(text, encoding="utf-8")
        logger.info(f"Poem downloaded to {target}")
        return target
