import pytest

from segplot.io.config import PlotConfig, load_plot_config, load_yaml


def test_defaults():
    cfg = PlotConfig()
    assert cfg.step == 500
    assert cfg.alpha == 0.05
    assert cfg.max_count == 80
    assert cfg.formats == ("png",)


def test_load_flat_yaml(tmp_path):
    p = tmp_path / "plot.yaml"
    p.write_text("step: 10\nalpha: 0.5\nformats: svg\n", encoding="utf-8")
    cfg = load_plot_config(p)
    assert cfg.step == 10
    assert cfg.alpha == 0.5
    assert cfg.formats == ("svg",)
    assert cfg.max_count == 80


def test_load_nested_yaml(tmp_path):
    p = tmp_path / "plot.yaml"
    p.write_text("plot:\n  max_count: 20\n  formats: [png, pdf]\n", encoding="utf-8")
    cfg = load_plot_config(p)
    assert cfg.max_count == 20
    assert cfg.formats == ("png", "pdf")


def test_empty_yaml_gives_defaults(tmp_path):
    p = tmp_path / "empty.yaml"
    p.write_text("", encoding="utf-8")
    assert load_yaml(p) == {}
    assert load_plot_config(p) == PlotConfig()


def test_non_mapping_yaml(tmp_path):
    p = tmp_path / "list.yaml"
    p.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(TypeError):
        load_plot_config(p)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_plot_config(tmp_path / "nope.yaml")


def test_unknown_key():
    with pytest.raises(ValueError, match="Unknown plot config keys: colour"):
        PlotConfig.from_mapping({"colour": "red"})


@pytest.mark.parametrize(
    "data",
    [{"step": 0}, {"alpha": 1.5}, {"max_count": -1}, {"dpi": 0}, {"formats": []}],
)
def test_invalid_values(data):
    with pytest.raises(ValueError):
        PlotConfig.from_mapping(data)


def test_with_overrides_skips_none():
    cfg = PlotConfig().with_overrides(step=2, alpha=None)
    assert cfg.step == 2
    assert cfg.alpha == 0.05


def test_yaml_config_drives_session_and_saving(tmp_path):
    import matplotlib

    from segplot.viz.pyplot import plot_session

    p = tmp_path / "plot.yaml"
    p.write_text("plot:\n  backend: Agg\n  dpi: 30\n  formats: [png, pdf]\n", encoding="utf-8")
    cfg = load_plot_config(p)
    with plot_session(backend=cfg.backend) as plt:
        assert matplotlib.get_backend().lower() == "agg"
        ax = plt.figure().gca()
        written = ax.save(tmp_path / "fig", cfg.formats, dpi=cfg.dpi)
    assert [w.name for w in written] == ["fig.png", "fig.pdf"]
    assert all(w.exists() for w in written)
