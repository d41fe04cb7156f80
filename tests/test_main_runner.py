import io
import json

import pytest

import config
import main_runner
from html_samples import grid_card, page


@pytest.fixture
def inbox(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "QUEUE_DIR", tmp_path / "queue")
    monkeypatch.setattr(config, "ARCHIVE_DIR", tmp_path / "archive")
    monkeypatch.setattr(config, "ERROR_DIR", tmp_path / "errors")
    monkeypatch.setattr(config, "OUTPUT_DIR", tmp_path / "output")
    config.QUEUE_DIR.mkdir()
    return tmp_path


def write_page(path, *blocks):
    path.write_text(page(*blocks), encoding="utf-8")
    return path


class TestScrapeCommand:
    def test_prints_tsv(self, tmp_path, capsys):
        html_file = write_page(
            tmp_path / "offers.html",
            grid_card("Deadpool account 57 skins", "10"),
            grid_card("Deadpool account 57 skins", "12"),
        )
        assert main_runner.main(["scrape", str(html_file)]) == 0
        out = capsys.readouterr().out
        assert "Title\tPlatform\tPrice\nDeadpool account 57 skins\t\t10.00" in out
        assert "1 duplicates removed." in out

    def test_clean_flag(self, tmp_path, capsys):
        html_file = write_page(tmp_path / "offers.html", grid_card("🔥 Deadpool • 57 skins 🔥", "3.5"))
        assert main_runner.main(["scrape", "--clean", str(html_file)]) == 0
        assert "Deadpool | 57 skins\t\t3.50" in capsys.readouterr().out

    def test_save_writes_reports(self, inbox, capsys):
        html_file = write_page(inbox / "offers.html", grid_card("Deadpool account 57 skins", "10"))
        assert main_runner.main(["scrape", "--save", str(html_file)]) == 0
        assert len(list(config.OUTPUT_DIR.glob("offers-*.tsv"))) == 1
        assert len(list(config.OUTPUT_DIR.glob("offers-*.json"))) == 1

    def test_blank_file_fails(self, tmp_path):
        html_file = tmp_path / "empty.html"
        html_file.write_text("   ", encoding="utf-8")
        assert main_runner.main(["scrape", str(html_file)]) == 1

    def test_latin1_fallback(self, tmp_path):
        html_file = tmp_path / "legacy.html"
        html_file.write_bytes(page(grid_card("Caf\xe9 account with skins", "2")).encode("latin-1"))
        assert "Caf\xe9" in main_runner.read_html(html_file)


class TestBeautifyCommand:
    def test_from_file(self, tmp_path, capsys):
        titles = tmp_path / "titles.txt"
        titles.write_text("hello\n\nPrime Vandal Diamond 2\n", encoding="utf-8")
        assert main_runner.main(["beautify", str(titles)]) == 0
        out = capsys.readouterr().out.splitlines()
        assert "[Full Access] ✅ High Value Account ✨ Hello ⚡️ Instant Delivery" in out
        assert "[Full Access] ✅ Prime + Diamond Rank ✨ Vandal 2 ⚡️ Instant Delivery" in out

    def test_from_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("hello\n"))
        assert main_runner.main(["beautify"]) == 0
        assert "[Full Access] ✅ High Value Account ✨ Hello ⚡️ Instant Delivery" in capsys.readouterr().out

    def test_blank_input_fails(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("\n\n"))
        assert main_runner.main(["beautify"]) == 1


class TestProcessFileSafely:
    def test_archives_and_reports(self, inbox):
        html_file = write_page(config.QUEUE_DIR / "page.html", grid_card("Valorant Radiant account EU", "30"))
        main_runner.process_file_safely(html_file)

        assert not html_file.exists()
        assert (config.ARCHIVE_DIR / "page.html").exists()
        json_files = list(config.OUTPUT_DIR.glob("page-*.json"))
        assert len(json_files) == 1
        data = json.loads(json_files[0].read_text(encoding="utf-8"))
        assert data["meta"]["engine"] == "rules"
        assert data["products"] == [{"title": "Valorant Radiant account EU", "price": 30.0, "currency": "USD"}]

    def test_failure_moves_to_errors(self, inbox):
        html_file = write_page(config.QUEUE_DIR / "broken.html", grid_card("Valorant Radiant account EU", "30"))
        main_runner.process_file_safely(html_file, engine="unknown")

        assert not html_file.exists()
        assert (config.ERROR_DIR / "broken.html").exists()
        assert not config.OUTPUT_DIR.exists()


class TestParser:
    def test_engine_choices(self):
        args = main_runner.build_parser().parse_args(["watch", "--engine", "gemini"])
        assert args.engine == "gemini"
        assert args.func is main_runner.cmd_watch

    def test_command_required(self):
        with pytest.raises(SystemExit):
            main_runner.build_parser().parse_args([])
