"""
Secure subprocess wrapper to prevent command injection and handle errors properly.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import os
import subprocess
import threading
from typing import Any, Dict, List, Optional

from .logger import get_logger

logger = get_logger(__name__)


class SecureSubprocess:
    """Runs whitelisted commands by absolute path, never through a shell."""

    # Commands this application is allowed to run
    ALLOWED_COMMANDS: Dict[str, Dict[str, Any]] = {
        'xbps-query': {
            'description': 'XBPS package database query utility',
            'search_paths': ['/usr/bin', '/bin', '/usr/local/bin'],
        },
    }

    # Cache for validated command paths
    _command_path_cache: Dict[str, str] = {}
    _validation_lock = threading.Lock()

    @classmethod
    def _find_command_path(cls, command: str) -> Optional[str]:
        """
        Find the absolute path of a command.

        Args:
            command: Command name to find

        Returns:
            Absolute path if found, None otherwise
        """
        with cls._validation_lock:
            cached_path = cls._command_path_cache.get(command)
            if cached_path and os.access(cached_path, os.X_OK):
                return cached_path
            cls._command_path_cache.pop(command, None)

            path_env = os.environ.get('PATH', '')
            paths = [p.strip() for p in path_env.split(os.pathsep) if p.strip()]
            extra_paths = cls.ALLOWED_COMMANDS.get(command, {}).get('search_paths', [])
            for std_path in extra_paths:
                if std_path not in paths:
                    paths.append(std_path)

            for path_dir in paths:
                full_path = os.path.join(path_dir, command)
                if os.path.isfile(full_path) and os.access(full_path, os.X_OK):
                    cls._command_path_cache[command] = full_path
                    logger.debug(f"Found command {command} at {full_path}")
                    return full_path

            logger.debug(f"Command {command} not found in system PATH")
            return None

    @classmethod
    def validate_command(cls, cmd: List[str]) -> List[str]:
        """
        Validate a command and resolve it to an absolute path.

        Args:
            cmd: Command as list of arguments

        Returns:
            Command with its first element replaced by the absolute path

        Raises:
            ValueError: If the command is not allowed
            FileNotFoundError: If the command is not installed
        """
        if not cmd:
            raise ValueError("Empty command")

        cmd_name = os.path.basename(cmd[0])
        if cmd_name not in cls.ALLOWED_COMMANDS:
            raise ValueError(f"Command '{cmd_name}' not in allowed list")

        secure_path = cls._find_command_path(cmd_name)
        if not secure_path:
            raise FileNotFoundError(f"Command not found: {cmd_name}")

        return [secure_path] + list(cmd[1:])

    @classmethod
    def run(
        cls,
        cmd: List[str],
        capture_output: bool = True,
        text: bool = True,
        check: bool = False,
        timeout: Optional[float] = None,
        **kwargs: Any
    ) -> subprocess.CompletedProcess:
        """
        Run a validated command.

        Args:
            cmd: Command to run
            capture_output: Whether to capture output
            text: Whether to decode output as text
            check: Whether to raise exception on non-zero exit
            timeout: Timeout in seconds
            **kwargs: Additional arguments for subprocess.run

        Returns:
            CompletedProcess instance
        """
        resolved = cls.validate_command(cmd)
        logger.debug(f"Running command: {' '.join(resolved)}")

        # Never use shell=True
        kwargs.pop('shell', None)

        try:
            result = subprocess.run(
                resolved,
                capture_output=capture_output,
                text=text,
                check=check,
                timeout=timeout,
                **kwargs
            )
        except subprocess.TimeoutExpired:
            logger.error(f"Command timed out after {timeout}s: {' '.join(resolved)}")
            raise
        except subprocess.CalledProcessError as e:
            logger.error(f"Command failed with code {e.returncode}: {' '.join(resolved)}")
            raise

        if result.returncode != 0:
            logger.debug(f"Command returned non-zero: {result.returncode}")

        return result
