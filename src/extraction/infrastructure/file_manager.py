"""
Менеджер файлов для домена Extraction.

Временные файлы запроса: загруженный PDF и растры страниц.
Всё, что создано за время запроса, удаляется до его завершения.
"""

import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from loguru import logger

from ..domain.exceptions import ExtractionFileSystemError


class ExtractionFileManager:
    """Менеджер временных файлов для домена Extraction."""

    def ensure_directory(self, directory_path: Path) -> Path:
        """
        Создает директорию если она не существует.

        Raises:
            ExtractionFileSystemError: Если не удалось создать директорию
        """
        try:
            directory_path.mkdir(parents=True, exist_ok=True)
            logger.debug(f"[Extraction] Директория создана/проверена: {directory_path}")
            return directory_path

        except OSError as e:
            raise ExtractionFileSystemError(
                message=f"Не удалось создать директорию: {directory_path}",
                component="ExtractionFileManager",
                original_error=e
            )

    def create_work_dir(self, parent: Path, prefix: str = "ocr_") -> Path:
        """
        Создает уникальную рабочую директорию для растров одного документа.

        Args:
            parent: Родительская директория
            prefix: Префикс имени

        Returns:
            Путь к новой директории
        """
        self.ensure_directory(parent)
        try:
            work_dir = Path(tempfile.mkdtemp(prefix=prefix, dir=str(parent)))
        except OSError as e:
            raise ExtractionFileSystemError(
                message=f"Не удалось создать рабочую директорию в {parent}",
                component="ExtractionFileManager",
                original_error=e
            )

        logger.debug(f"[Extraction] Рабочая директория: {work_dir}")
        return work_dir

    def remove_file(self, file_path: Path) -> bool:
        """
        Удаляет файл.

        Returns:
            True если файл был удален, False если его уже не было

        Raises:
            ExtractionFileSystemError: Если файл есть, но удалить не удалось
        """
        try:
            file_path.unlink()
        except FileNotFoundError:
            logger.debug(f"[Extraction] Файл уже удален: {file_path}")
            return False
        except OSError as e:
            raise ExtractionFileSystemError(
                message=f"Не удалось удалить файл: {file_path}",
                component="ExtractionFileManager",
                original_error=e
            )

        logger.debug(f"[Extraction] Файл удален: {file_path}")
        return True

    def remove_dir(self, directory_path: Path) -> None:
        """Удаляет директорию вместе с содержимым."""
        if not directory_path.exists():
            return
        try:
            shutil.rmtree(directory_path)
        except OSError as e:
            raise ExtractionFileSystemError(
                message=f"Не удалось удалить директорию: {directory_path}",
                component="ExtractionFileManager",
                original_error=e
            )
        logger.debug(f"[Extraction] Директория удалена: {directory_path}")

    @contextmanager
    def document_scope(self, document: Path) -> Iterator[Path]:
        """
        Владение временным документом на время запроса.

        Документ удаляется ровно один раз при выходе из блока,
        и при успехе, и при ошибке. Если блок уже падает, ошибка
        удаления только логируется: наружу уходит исходное исключение.
        """
        logger.debug(f"[Extraction] Документ взят в обработку: {document.name}")
        try:
            yield document
        except BaseException:
            try:
                self.remove_file(document)
            except ExtractionFileSystemError as cleanup_error:
                logger.error(f"[Extraction] Документ не удален после ошибки: {cleanup_error}")
            raise
        self.remove_file(document)
