from santa_draw.cli.interactive import run

__all__ = ["run"]
