from nock.types.noun import Noun, Atom, Cell, NounLike, YES, NO, noun, nouns_equal, format_atom

__all__ = ["Noun", "Atom", "Cell", "NounLike", "YES", "NO", "noun", "nouns_equal", "format_atom"]
