from santa_draw.cli.main import entrypoint

entrypoint()
