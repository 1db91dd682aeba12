"""Parameter sets for the lattice KEM at its three security levels."""

from __future__ import annotations

from dataclasses import dataclass

N = 256
Q = 3329
SYMBYTES = 32
SSBYTES = 32
POLYBYTES = 384
ETA2 = 2


@dataclass(frozen=True)
class KyberParams:
    """Sizes and noise parameters that follow from the module rank ``k``."""

    k: int
    eta1: int
    polycompressedbytes: int
    polyveccompressedbytes: int
    n: int = N
    q: int = Q
    symbytes: int = SYMBYTES
    ssbytes: int = SSBYTES
    polybytes: int = POLYBYTES
    eta2: int = ETA2

    @property
    def name(self) -> str:
        return f"kyber{self.k * self.n}"

    @property
    def polyvecbytes(self) -> int:
        return self.k * self.polybytes

    @property
    def indcpa_msgbytes(self) -> int:
        return self.symbytes

    @property
    def indcpa_publickeybytes(self) -> int:
        return self.polyvecbytes + self.symbytes

    @property
    def indcpa_secretkeybytes(self) -> int:
        return self.polyvecbytes

    @property
    def indcpa_bytes(self) -> int:
        return self.polyveccompressedbytes + self.polycompressedbytes

    @property
    def publickeybytes(self) -> int:
        return self.indcpa_publickeybytes

    @property
    def secretkeybytes(self) -> int:
        # The extra symbytes hold H(pk) and the rejection value z.
        return (
            self.indcpa_secretkeybytes
            + self.indcpa_publickeybytes
            + 2 * self.symbytes
        )

    @property
    def ciphertextbytes(self) -> int:
        return self.indcpa_bytes


_PARAMS = {
    2: KyberParams(k=2, eta1=3, polycompressedbytes=128, polyveccompressedbytes=2 * 320),
    3: KyberParams(k=3, eta1=2, polycompressedbytes=128, polyveccompressedbytes=3 * 320),
    4: KyberParams(k=4, eta1=2, polycompressedbytes=160, polyveccompressedbytes=4 * 352),
}


def params_for(k: int) -> KyberParams:
    """Return the parameter set for module rank ``k`` (2, 3 or 4)."""
    try:
        return _PARAMS[k]
    except (KeyError, TypeError):
        raise ValueError(f"k must be in {{2, 3, 4}}, got {k!r}") from None