from instance_cache.cli import app

app()
