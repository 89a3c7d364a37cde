from __future__ import annotations

from pathlib import Path
import tempfile
import unittest

from signal_drawer import stack
from signal_drawer.colors import coerce_color, parse_hex_color
from signal_drawer.config import PlotConfig, load_plot_config, plot_config


class PlotConfigTests(unittest.TestCase):
    def test_defaults_and_derived_tick_unit(self) -> None:
        config = plot_config()
        self.assertEqual((config.plot_height, config.plot_width, config.label_space), (300, 2000, 80))
        self.assertEqual(config.space_part, 10)
        self.assertEqual(plot_config(label_space=100).space_part, 12)
        self.assertEqual((config.widget_width, config.widget_height), (2160, 460))

    def test_config_is_frozen(self) -> None:
        config = plot_config()
        with self.assertRaises(AttributeError):
            config.plot_height = 10  # type: ignore[misc]

    def test_invalid_layout_rejected(self) -> None:
        with self.assertRaises(ValueError):
            plot_config(plot_height=0)
        with self.assertRaises(ValueError):
            plot_config(plot_width=-5)
        with self.assertRaises(ValueError):
            plot_config(label_space=4)
        with self.assertRaises(ValueError):
            plot_config(plot_height=1.5)  # type: ignore[arg-type]

    def test_load_layout_from_toml(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "drawer.toml"
            path.write_text("[layout]\nplot_height = 120\nlabel_space = 40\n", encoding="utf-8")
            config = load_plot_config(path)
            self.assertEqual(config, PlotConfig(plot_height=120, plot_width=2000, label_space=40))
            self.assertEqual(stack(config_path=path).config, config)

    def test_missing_layout_table_yields_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "drawer.toml"
            path.write_text("title = 'unused'\n", encoding="utf-8")
            self.assertEqual(load_plot_config(path), PlotConfig())

    def test_unknown_layout_key_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "drawer.toml"
            path.write_text("[layout]\nplot_hieght = 120\n", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_plot_config(path)


class ColorTests(unittest.TestCase):
    def test_hex_colors(self) -> None:
        self.assertEqual(parse_hex_color("#FF8000"), (255, 128, 0, 255))
        self.assertEqual(parse_hex_color("#00000080"), (0, 0, 0, 128))
        with self.assertRaises(ValueError):
            parse_hex_color("orange")

    def test_coerce_color_accepts_rgb_rgba_and_hex(self) -> None:
        self.assertEqual(coerce_color((1, 2, 3)), (1, 2, 3, 255))
        self.assertEqual(coerce_color((1, 2, 3, 4)), (1, 2, 3, 4))
        self.assertEqual(coerce_color("#010203"), (1, 2, 3, 255))
        with self.assertRaises(ValueError):
            coerce_color((1, 2))  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
