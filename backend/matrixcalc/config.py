import os


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key')
    MATRIX_DATA_DIR = os.environ.get('MATRIX_DATA_DIR', os.getcwd())
    MATRIX_RESULT_FILE = os.environ.get('MATRIX_RESULT_FILE', 'result.txt')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    # Uploaded matrix files
    MAX_CONTENT_LENGTH = int(os.environ.get('MAX_CONTENT_LENGTH', 16 * 1024 * 1024))
    TESTING = False
    DEBUG = False


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class TestingConfig(Config):
    TESTING = True


class ProductionConfig(Config):
    SECRET_KEY = os.environ.get('SECRET_KEY')


config_by_name = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
}
