import config


class TestLoadTitlePrefixes:
    def test_reads_file(self, tmp_path):
        filters = tmp_path / "title_filters.txt"
        filters.write_text("# boilerplate offers\nSPAM offer\n\n   \nBundle 10x \n", encoding="utf-8")
        assert config.load_title_prefixes(filters) == ["SPAM offer", "Bundle 10x "]

    def test_missing_file_uses_defaults(self, tmp_path):
        prefixes = config.load_title_prefixes(tmp_path / "missing.txt")
        assert prefixes == config.DEFAULT_TITLE_PREFIXES
        assert prefixes is not config.DEFAULT_TITLE_PREFIXES

    def test_defaults(self):
        assert config.MIN_TITLE_LENGTH == 14
        assert "Total 120x Accounts" in config.DEFAULT_TITLE_PREFIXES
