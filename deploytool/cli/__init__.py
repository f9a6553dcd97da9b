from .deploy_cli import cli

__all__ = ['cli']
