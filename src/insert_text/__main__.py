from insert_text.cli import entrypoint

entrypoint()
