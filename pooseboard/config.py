from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='DB_')

    URL: str = Field('', validation_alias='DATABASE_URL')
    POOL_MIN_SIZE: int = 1
    POOL_MAX_SIZE: int = 10
    COMMAND_TIMEOUT: float = 10.0

database = DatabaseConfig()

class ServerConfig(BaseSettings):
    HOST: str = '0.0.0.0'
    PORT: int = 3000
    LOG_LEVEL: str = 'INFO'
    RESPONSE_CHARSET: str = 'ISO-8859-1'

server = ServerConfig()
