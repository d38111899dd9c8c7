"""HTTP cookie wire format: value codec and Set-Cookie serialization."""
