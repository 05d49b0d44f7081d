import pytest

from plagcheck.errors import DocumentIOError, DocumentReadError, ResultWriteError
from plagcheck.utils.io import _guess_encoding, read_document, write_result

GBK_TEXT = (
    "这是一个用于测试编码检测的中文段落。我们在这里写了很多汉字，"
    "以便字符集检测程序能够可靠地识别出文件使用的是国标编码而不是统一码。"
)


class TestReadDocument:
    def test_reads_utf8_and_appends_newline(self, tmp_path):
        content = "测试UTF-8编码：Hello World! 123@#$%"
        path = tmp_path / "doc.txt"
        path.write_bytes(content.encode("utf-8"))

        doc = read_document(path)
        assert doc.raw_text == content + "\n"
        assert doc.source_path == str(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_bytes(b"")
        assert read_document(path).raw_text == "\n"

    def test_missing_file_raises(self, tmp_path):
        missing = tmp_path / "nonexistent.txt"
        with pytest.raises(DocumentReadError) as exc_info:
            read_document(missing)
        assert "nonexistent.txt" in str(exc_info.value)
        assert isinstance(exc_info.value, OSError)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_directory_raises(self, tmp_path):
        with pytest.raises(DocumentIOError):
            read_document(tmp_path)

    def test_undecodable_bytes_raise(self, tmp_path):
        path = tmp_path / "gbk.txt"
        path.write_bytes(GBK_TEXT.encode("gbk"))

        with pytest.raises(DocumentReadError) as exc_info:
            read_document(path)
        assert "utf-8" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_alternate_encoding(self, tmp_path):
        path = tmp_path / "gbk.txt"
        path.write_bytes(GBK_TEXT.encode("gbk"))
        assert read_document(path, encoding="gbk").raw_text == GBK_TEXT + "\n"


class TestGuessEncoding:
    def test_detects_gb_family(self):
        guess = _guess_encoding(GBK_TEXT.encode("gbk"))
        assert guess is not None
        assert guess.lower().startswith("gb")


class TestWriteResult:
    def test_writes_without_trailing_newline(self, tmp_path):
        path = tmp_path / "result.txt"
        write_result(path, "85.67%")
        assert path.read_bytes() == b"85.67%"

    def test_overwrites_existing(self, tmp_path):
        path = tmp_path / "result.txt"
        path.write_text("old content that is longer", encoding="utf-8")
        write_result(path, "1.00%")
        assert path.read_text(encoding="utf-8") == "1.00%"

    def test_unwritable_path_raises(self, tmp_path):
        path = tmp_path / "no" / "such" / "dir" / "result.txt"
        with pytest.raises(ResultWriteError):
            write_result(path, "85.67%")
