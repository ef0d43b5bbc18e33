import uvicorn
from zoo.config import get_settings

uvicorn.run(
    'zoo.app:app',
    host=get_settings().app_host,
    port=get_settings().app_port,
    workers=1
)
