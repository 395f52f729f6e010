import pytest

from src.extraction.domain.exceptions import ExtractionFileSystemError
from src.extraction.infrastructure.file_manager import ExtractionFileManager


@pytest.fixture
def file_manager():
    """Fixture для ExtractionFileManager."""
    return ExtractionFileManager()


def test_document_deleted_after_scope(file_manager, pdf_document):
    """Тест: документ удаляется при выходе из блока."""
    with file_manager.document_scope(pdf_document) as document:
        assert document.exists()

    assert not pdf_document.exists()


def test_document_deleted_on_error(file_manager, pdf_document):
    """Тест: документ удаляется и при ошибке, ошибка не глотается."""
    with pytest.raises(RuntimeError, match="boom"):
        with file_manager.document_scope(pdf_document):
            raise RuntimeError("boom")

    assert not pdf_document.exists()


def failing_remove(file_path):
    raise ExtractionFileSystemError(message=f"Не удалось удалить файл: {file_path}", component="test")


def test_cleanup_error_does_not_replace_original(file_manager, pdf_document, monkeypatch):
    """Тест: ошибка удаления документа не подменяет исключение блока."""
    monkeypatch.setattr(file_manager, "remove_file", failing_remove)

    with pytest.raises(RuntimeError, match="boom"):
        with file_manager.document_scope(pdf_document):
            raise RuntimeError("boom")


def test_cleanup_error_after_success_propagates(file_manager, pdf_document, monkeypatch):
    """Тест: при успешном блоке ошибка удаления не глотается."""
    monkeypatch.setattr(file_manager, "remove_file", failing_remove)

    with pytest.raises(ExtractionFileSystemError):
        with file_manager.document_scope(pdf_document):
            pass


def test_document_already_removed(file_manager, pdf_document):
    """Тест: если документ уже удалён внутри блока - выход без ошибки."""
    with file_manager.document_scope(pdf_document):
        pdf_document.unlink()

    assert not pdf_document.exists()


def test_remove_file_reports_result(file_manager, tmp_path):
    """Тест: remove_file возвращает True/False."""
    path = tmp_path / "page_1.png"
    path.write_bytes(b"x")

    assert file_manager.remove_file(path) is True
    assert file_manager.remove_file(path) is False


def test_remove_file_error(file_manager, tmp_path):
    """Тест: директория вместо файла -> ExtractionFileSystemError."""
    directory = tmp_path / "not_a_file"
    directory.mkdir()

    with pytest.raises(ExtractionFileSystemError):
        file_manager.remove_file(directory)


def test_work_dir_lifecycle(file_manager, tmp_path):
    """Тест: рабочая директория создаётся уникальной и удаляется с содержимым."""
    parent = tmp_path / "tmp"

    first = file_manager.create_work_dir(parent)
    second = file_manager.create_work_dir(parent)
    (first / "page_1.png").write_bytes(b"x")

    assert first != second
    assert first.parent == parent

    file_manager.remove_dir(first)
    file_manager.remove_dir(first)  # повторно - без ошибки

    assert not first.exists()
    assert second.exists()
