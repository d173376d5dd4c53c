"""Runtime helpers shared by the CLI and analysis layers."""
