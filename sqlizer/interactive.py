"""
Interactive setup for the sqlizer config file.

Backs ``sqlizer config init``: prompts for the SQL Server connection
settings with rich and saves them through :class:`ConfigManager`.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import IntPrompt, Prompt

from .config import DEFAULT_DRIVER, DEFAULT_PORT, ConfigError, ConfigManager
from .logging_config import get_logger

logger = get_logger(__name__)


class ConfigInitHandler:
    """Prompt for connection settings and write them to the config file."""

    def __init__(
        self,
        manager: ConfigManager,
        console: Console | None = None,
        err_console: Console | None = None,
    ) -> None:
        """Initialize the handler.

        Args:
            manager: Config manager owning the target file.
            console: Rich console for prompts (creates new if None).
            err_console: Console for error messages (stderr if None).
        """
        self.manager = manager
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def ask(self) -> dict[str, Any]:
        """Prompt for each server setting.

        Returns:
            Settings keyed as in the config file's ``server`` section.
        """
        self.console.print(
            Panel.fit(
                "[bold blue]sqlizer configuration[/bold blue]\n"
                f"Settings will be saved to [cyan]{self.manager.config_path}[/cyan]",
                border_style="blue",
            )
        )

        host = Prompt.ask(
            "Enter the host name for your SQL Server instance",
            console=self.console,
        )
        port = IntPrompt.ask(
            "Enter the port number for your SQL Server instance",
            default=DEFAULT_PORT,
            console=self.console,
        )
        user = Prompt.ask("Target database user?", console=self.console)
        password = Prompt.ask(
            "Target database pass?", password=True, console=self.console
        )
        driver = Prompt.ask(
            "ODBC driver name", default=DEFAULT_DRIVER, console=self.console
        )

        return {
            "host": host.strip(),
            "port": port,
            "user": user.strip(),
            "pass": password,
            "driver": driver.strip(),
        }

    def run(self) -> int:
        """Run the prompts and save the answers.

        Returns:
            Exit code (0 for success, 1 if the config could not be written).
        """
        if self.manager.exists():
            self.err_console.print(
                f"[red]While writing config: config file already exists: "
                f"{self.manager.config_path}[/red]"
            )
            logger.warning("Refusing to overwrite %s", self.manager.config_path)
            return 1

        try:
            settings = self.ask()
        except KeyboardInterrupt:
            self.console.print("\n[yellow]Configuration cancelled[/yellow]")
            return 1

        try:
            path = self.manager.save_server_settings(settings)
        except ConfigError as e:
            self.err_console.print(f"[red]While writing config: {escape(str(e))}[/red]")
            logger.error("Failed to write config: %s", e)
            return 1

        self.console.print(f"[green]Config written to {path}[/green]")
        return 0
