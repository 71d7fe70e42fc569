from eightpuzzle.engine.alphabet.alphabet import Alphabet

__all__ = ["Alphabet"]
