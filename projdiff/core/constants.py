"""
Константы системы сравнения проектов.
"""

# Версия системы
VERSION = "1.0.0"
TOOL_NAME = "projdiff"

# Значение-заглушка для отсутствующего значения в DifferentValue.
# Используется во всех форматах вывода без изменений.
NIL = "nil"

# Маркеры заголовков отчёта
SUCCESS_MARK = "✅"
FAILURE_MARK = "❌"
ERROR_MARK = "❓"
WARNING_MARK = "⚠️"

# Маркеры списков консольного формата по уровням отступа
CONSOLE_BULLETS = {
    0: "»",
    1: "•",
    2: "◦",
}

# Контекст настроек уровня проекта (не таргета)
ROOT_PROJECT_CONTEXT = "Root project"

# Файл описания проекта внутри каталога
PROJECT_FILE_NAME = "project.json"

# Форматы вывода
OUTPUT_FORMATS = {
    'CONSOLE': 'console',
    'MARKDOWN': 'markdown',
    'JSON': 'json',
    'HTML': 'html',
}

# Именованные наборы компараторов
COMPARATOR_SETS = {
    'ALL': 'all',
    'DEFAULT': 'default',
}

# Коды завершения процесса
EXIT_CODES = {
    'SUCCESS': 0,
    'DIFFERENCES': 1,
    'FAILURE': 2,
}

# Конфигурационные параметры по умолчанию
DEFAULT_CONFIG = {
    'general': {
        'log_level': 'WARNING',
        'max_workers': 1,
    },
    'comparison': {
        'comparators': 'default',
        'continue_after_error': False,
        'differences_only': False,
    },
    'output': {
        'format': 'console',
        'verbose': False,
    },
    'resolved_settings': {
        'command': [
            'xcodebuild',
            '-project', '{project}',
            '-target', '{target}',
            '-configuration', '{configuration}',
            '-showBuildSettings',
            '-json',
        ],
        'timeout_seconds': 120,
    },
}
