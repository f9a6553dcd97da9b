from .command_runner import CommandResult, run_command, which

__all__ = ['CommandResult', 'run_command', 'which']
