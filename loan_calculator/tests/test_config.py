import config


def test_defaults_loaded_from_yaml():
    assert config.PRINCIPAL > 0
    assert config.ANNUAL_RATE_PERCENT >= 0
    assert isinstance(config.TERM_MONTHS, int) and config.TERM_MONTHS >= 1
    assert config.LOG_LEVEL in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def test_missing_file_falls_back_to_defaults(tmp_path):
    cfg = config.load_config(tmp_path / "absent.yaml")
    assert cfg == config.DEFAULTS


def test_yaml_overrides_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("principal: 250000\nterm_months: 360\n", encoding="utf-8")
    cfg = config.load_config(path)
    assert cfg["principal"] == 250000
    assert cfg["term_months"] == 360
    assert cfg["interest_color"] == config.DEFAULTS["interest_color"]


def test_non_mapping_yaml_ignored(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    assert config.load_config(path) == config.DEFAULTS
