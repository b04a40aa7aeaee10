from nock.reader.parser import lex, TokenStream, Operation, Expression, read_noun

__all__ = ["lex", "TokenStream", "Operation", "Expression", "read_noun"]
