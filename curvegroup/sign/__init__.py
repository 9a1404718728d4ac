from .schnorr import hash_schnorr, sign, split_signature, verify
