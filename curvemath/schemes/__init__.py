# Textbook public key schemes, each a thin layer over curvemath's arithmetic.
# For learning and testing, not for protecting anything.

from . import ecdsa, elgamal, rsa, schnorr, zkp
