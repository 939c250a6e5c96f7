"""Tests for CLI module."""

import os

import pytest

from tiersize.cli import create_parser, main, cmd_resize, get_resize_config, parse_tiers
from tiersize.size_tier import SizeTier


class TestCreateParser:
    """Tests for argument parser creation."""

    def test_parser_created(self):
        """Test parser is created successfully."""
        parser = create_parser()
        assert parser is not None

    def test_resize_command(self):
        """Test resize command parsing."""
        parser = create_parser()
        args = parser.parse_args([
            'resize', 'kitchen', 'living',
            '--input-dir', '/photos', '--quality', '70', '--tier', 'lg', '--tier', 'thumb'
        ])

        assert args.command == 'resize'
        assert args.names == ['kitchen', 'living']
        assert args.input_dir == '/photos'
        assert args.quality == 70
        assert args.tier == ['lg', 'thumb']

    def test_resize_defaults(self):
        """Test resize defaults."""
        args = create_parser().parse_args(['resize'])

        assert args.names == []
        assert args.dry_run is False
        assert args.quiet is False

    def test_classify_command(self):
        """Test classify command parsing."""
        args = create_parser().parse_args(['classify', 'a.jpg', 'b.jpg'])

        assert args.command == 'classify'
        assert args.paths == ['a.jpg', 'b.jpg']


class TestConfigFromArgs:
    """Tests for building config from arguments."""

    def test_cli_overrides_env(self, monkeypatch):
        """Test CLI flags win over environment variables."""
        monkeypatch.setenv('TIERSIZE_INPUT_DIR', '/env/in')
        monkeypatch.setenv('TIERSIZE_QUALITY', '50')
        args = create_parser().parse_args(['resize', 'kitchen', '--input-dir', '/cli/in'])

        config = get_resize_config(args)

        assert config.input_dir == '/cli/in'
        assert config.quality == 50
        assert config.base_filenames == ['kitchen']

    def test_parse_tiers(self):
        """Test tier tag parsing."""
        assert parse_tiers(None) is None
        assert parse_tiers(['md', 'avatar']) == [SizeTier.MEDIUM, SizeTier.AVATAR]
        with pytest.raises(ValueError):
            parse_tiers(['huge'])


class TestMain:
    """Tests for main entry point."""

    def test_no_command(self):
        """Test running without command shows help."""
        result = main([])
        assert result == 1

    def test_tiers(self, capsys):
        """Test listing tiers."""
        assert main(['tiers']) == 0

        out = capsys.readouterr().out
        assert 'thumb' in out
        assert '1024' in out

    def test_resize(self, resize_config, capsys):
        """Test a full resize run."""
        result = main(['resize', 'kitchen', 'bathroom', '--input-dir', resize_config.input_dir])

        assert result == 0
        assert len(os.listdir(resize_config.resolved_output_dir)) == 12
        out = capsys.readouterr().out
        assert 'Image: Landscape Large' in out
        assert 'Image: Portrait Small' in out

    def test_resize_missing_image(self, resize_config):
        """Test a missing image gives exit code 1."""
        result = main(['resize', 'nope', '--input-dir', resize_config.input_dir])

        assert result == 1

    def test_resize_invalid_config(self, tmp_path):
        """Test invalid configuration gives exit code 1."""
        result = main(['resize', 'kitchen', '--input-dir', str(tmp_path), '--quality', '0'])

        assert result == 1

    def test_resize_unknown_tier(self, resize_config):
        """Test an unknown --tier tag gives exit code 1."""
        result = main(['resize', 'kitchen', '--input-dir', resize_config.input_dir, '--tier', 'huge'])

        assert result == 1

    def test_classify(self, resize_config, capsys):
        """Test classifying images without writing."""
        path = resize_config.input_path('kitchen')

        assert main(['classify', path]) == 0

        assert 'Landscape Large' in capsys.readouterr().out
        assert not os.path.exists(resize_config.resolved_output_dir)

    def test_classify_missing(self, tmp_path):
        assert main(['classify', str(tmp_path / 'none.jpg')]) == 1


class TestCmdResize:
    """Tests for resize command."""

    def test_dry_run(self, resize_config, capsys):
        """Test dry run writes nothing."""
        args = create_parser().parse_args(['resize', '-n', '--input-dir', resize_config.input_dir, 'kitchen'])
        args.verbose = False

        result = cmd_resize(args)

        assert result == 0
        assert not os.path.exists(resize_config.resolved_output_dir)
        assert 'DRY RUN' in capsys.readouterr().out
