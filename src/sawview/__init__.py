"""sawview: terminal viewer for Hyperledger Sawtooth blocks and state."""

__version__ = "0.1.0"
