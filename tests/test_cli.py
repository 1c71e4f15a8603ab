"""Tests for the command-line interface."""

import json

import pandas as pd

from nsp_segmenter.cli import build_config, build_parser, main


class TestSegmentCommand:
    """Tests for the segment subcommand."""

    def test_prints_paths_and_count(self, dictionary_file, capsys):
        exit_code = main([
            "segment", "--sentence", "abc", "--dict", str(dictionary_file), "--n-path", "1",
        ])

        assert exit_code == 0
        assert capsys.readouterr().out.splitlines() == ["a-bc", "ab-c", "len(paths): 2"]

    def test_count_only(self, dictionary_file, capsys):
        exit_code = main([
            "segment", "--sentence", "abc", "--dict", str(dictionary_file),
            "--n-path", "2", "--count-only",
        ])

        assert exit_code == 0
        assert capsys.readouterr().out.splitlines() == ["len(paths): 3"]

    def test_without_dictionary(self, capsys):
        assert main(["segment", "--sentence", "围城", "--delimiter", "|"]) == 0
        assert capsys.readouterr().out.splitlines() == ["围|城", "len(paths): 1"]

    def test_invalid_n_path(self, dictionary_file, capsys):
        exit_code = main([
            "segment", "--sentence", "abc", "--dict", str(dictionary_file), "--n-path", "0",
        ])

        assert exit_code == 1
        assert "Error" in capsys.readouterr().err

    def test_missing_dictionary(self, tmp_path, capsys):
        exit_code = main([
            "segment", "--sentence", "abc", "--dict", str(tmp_path / "missing.txt"),
        ])

        assert exit_code == 1
        assert "Dictionary not found" in capsys.readouterr().err

    def test_path_cap_exceeded(self, dictionary_file, capsys):
        exit_code = main([
            "segment", "--sentence", "abc", "--dict", str(dictionary_file), "--max-paths", "3",
        ])

        assert exit_code == 1
        assert "exceeding the cap of 3" in capsys.readouterr().err


class TestRunCommand:
    """Tests for the run subcommand."""

    def test_run_writes_csv(self, tmp_path, dictionary_file, capsys):
        input_path = tmp_path / "input.jsonl"
        input_path.write_text(
            json.dumps({"id": "r1", "text": "围城故事"}, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
        output_dir = tmp_path / "out"

        exit_code = main([
            "run", "--input", str(input_path), "--dict", str(dictionary_file),
            "--output", str(output_dir), "--n-path", "1",
        ])

        assert exit_code == 0
        assert "Processed 1 lines" in capsys.readouterr().out
        df = pd.read_csv(output_dir / "Full_Files" / "All_Segments.csv")
        assert df["Segmentation"].tolist() == ["围城-故事"]

    def test_run_requires_input(self, dictionary_file, capsys):
        assert main(["run", "--dict", str(dictionary_file)]) == 1
        assert "Input file is required" in capsys.readouterr().err

    def test_run_requires_dictionary(self, tmp_path, capsys):
        assert main(["run", "--input", str(tmp_path / "in.jsonl")]) == 1
        assert "Dictionary is required" in capsys.readouterr().err


def test_build_config_overrides_yaml(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "segmentation:\n  n_path: 4\n  max_word_len: 5\noutput:\n  output_dir: out\n",
        encoding="utf-8",
    )
    args = build_parser().parse_args([
        "run", "--config", str(config_path), "--n-path", "2", "--workers", "3",
        "--no-split-clauses", "--no-full-files",
    ])

    config = build_config(args)

    assert config.segmentation.n_path == 2
    assert config.segmentation.max_word_len == 5
    assert config.segmentation.workers == 3
    assert not config.segmentation.split_clauses
    assert not config.output.save_full_files
    assert str(config.output.output_dir) == "out"


class TestInvalidConfigFile:
    """A broken --config file is reported, not raised."""

    def test_malformed_yaml(self, tmp_path, capsys):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("segmentation: [\n", encoding="utf-8")

        assert main(["run", "--config", str(config_path)]) == 1
        assert "Error" in capsys.readouterr().err

    def test_top_level_list(self, tmp_path, capsys):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("- n_path\n- 3\n", encoding="utf-8")

        assert main(["run", "--config", str(config_path)]) == 1
        assert "mapping at the top level" in capsys.readouterr().err
