import asyncio
import logging
from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import Optional

from app.exceptions import FileIntakeError

logger = logging.getLogger(__name__)


class FileIntake:
    """
    Stores an uploaded image under a fixed directory and hands back the
    relative reference (`images/<name>`) that the static root serves it from.
    """

    def __init__(
        self, images_dir: Path, reference_prefix: str = "images", timeout: float = 10.0
    ):
        self.images_dir = Path(images_dir)
        self.reference_prefix = reference_prefix.strip("/")
        self.timeout = timeout

    @staticmethod
    def stored_name(original_name: str) -> str:
        # Keep only the final path component, whichever separator the client used
        return PureWindowsPath(PurePosixPath(original_name).name).name

    def _write(self, target: Path, data: bytes):
        self.images_dir.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)

    async def store(
        self, data: Optional[bytes], original_name: Optional[str]
    ) -> Optional[str]:
        if data is None or not original_name:
            return None

        name = self.stored_name(original_name)
        if name in ("", ".", ".."):
            raise FileIntakeError(original_name, "invalid file name")

        target = self.images_dir / name
        try:
            await asyncio.wait_for(
                asyncio.to_thread(self._write, target, data), timeout=self.timeout
            )
        except asyncio.TimeoutError:
            logger.error(f"Timed out writing image {target}")
            raise FileIntakeError(name, "timed out")
        except OSError as e:
            logger.error(f"Failed writing image {target}: {e}", exc_info=True)
            raise FileIntakeError(name, str(e))

        logger.info(f"Stored image {name} ({len(data)} bytes)")
        return f"{self.reference_prefix}/{name}"
