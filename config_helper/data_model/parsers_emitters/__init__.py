from .config_file_parser_emitter import ConfigFileParserEmitter

__all__ = ["ConfigFileParserEmitter"]
