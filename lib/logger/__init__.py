from lib.logger.logger import Logger, LoggerSettings, LogLevel

__all__ = ["Logger", "LoggerSettings", "LogLevel"]
