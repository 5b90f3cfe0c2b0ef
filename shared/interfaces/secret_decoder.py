"""Abstract secret decoder interface."""

from abc import ABC, abstractmethod


class SecretDecoder(ABC):
    """Abstract secret decoder interface.
    
    All secret decoders must implement:
    - decode: Convert an encoded secret back to its plaintext
    
    Decoders are stateless; one instance may be shared across threads.
    """
    
    @abstractmethod
    def decode(self, encoded: str) -> str:
        """Decode a secret.
        
        Args:
            encoded: Encoded secret with surrounding whitespace removed
            
        Returns:
            Plaintext string
            
        Raises:
            DecodeError: If the input is malformed or cannot be decoded
        """
        pass
