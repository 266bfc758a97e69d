from lambic.reader.parser import lex, read, read_all, Token, TokenStream

__all__ = ["lex", "read", "read_all", "Token", "TokenStream"]
