"""Tests for configuration via environment variables."""

import os
from pathlib import Path
from unittest.mock import MagicMock, patch

from makefile_gen.core.templates import BOILERPLATE


class TestEnvironmentConfiguration:
    """Tests for environment variable configuration."""

    def test_log_level_from_env(self, tmp_path: Path) -> None:
        """Log level can be set via environment variable."""
        with patch.dict(os.environ, {"MAKEFILE_GEN_LOG_LEVEL": "DEBUG"}):
            from makefile_gen.__main__ import cmd_generate

            args = MagicMock()
            args.log_level = "WARNING"  # CLI default
            args.path = str(tmp_path)
            args.overwrite = False

            with patch("makefile_gen.__main__.setup_logging") as mock_logging:
                cmd_generate(args)

            # Should use env var, not CLI default
            mock_logging.assert_called_once_with("DEBUG")

    def test_makefile_path_from_env(self, tmp_path: Path) -> None:
        """Makefile path falls back to the environment variable."""
        with patch.dict(os.environ, {"MAKEFILE_GEN_PATH": str(tmp_path)}):
            from makefile_gen.__main__ import cmd_generate

            args = MagicMock()
            args.log_level = "WARNING"
            args.path = None  # Not set via CLI
            args.overwrite = False

            with patch("makefile_gen.__main__.setup_logging"):
                cmd_generate(args)

        assert (tmp_path / "Makefile").read_text() == BOILERPLATE

    def test_cli_path_overrides_env(self, tmp_path: Path) -> None:
        """-p takes precedence over MAKEFILE_GEN_PATH."""
        env_dir = tmp_path / "env"
        cli_dir = tmp_path / "cli"
        env_dir.mkdir()
        cli_dir.mkdir()

        with patch.dict(os.environ, {"MAKEFILE_GEN_PATH": str(env_dir)}):
            from makefile_gen.__main__ import cmd_generate

            args = MagicMock()
            args.log_level = "WARNING"
            args.path = str(cli_dir)
            args.overwrite = False

            with patch("makefile_gen.__main__.setup_logging"):
                cmd_generate(args)

        assert (cli_dir / "Makefile").exists()
        assert not (env_dir / "Makefile").exists()

    def test_serve_uses_env_path(self) -> None:
        """serve passes the configured path to the server."""
        with patch.dict(os.environ, {"MAKEFILE_GEN_PATH": "/custom/project"}):
            from makefile_gen.__main__ import cmd_serve

            args = MagicMock()
            args.log_level = "INFO"
            args.path = None
            args.no_overwrite = True

            with patch("makefile_gen.__main__.setup_logging"):
                with patch("makefile_gen.__main__.MakefileGenServer") as mock_server:
                    with patch("makefile_gen.__main__.asyncio.run"):
                        cmd_serve(args)

            call_args = mock_server.call_args
            assert str(call_args[1]["default_path"]) == "/custom/project"
            assert call_args[1]["allow_overwrite"] is False
