"""
chacha_stream — Live Demo: ChaCha20 Keystream Cursor
=====================================================
Run:  python examples/demo_chacha20.py

Walks through the RFC 8439 encryption vector, resuming mid-stream with
seek(), whole-block access with get_keystream(), and a cross-check
against the cryptography (OpenSSL) implementation.
"""

import sys, os, time
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from chacha_stream           import ChaCha20, ReferenceChaCha20, crypt
from chacha_stream.selftest  import RFC_KEY, RFC_NONCE, SUNSCREEN, SUNSCREEN_CT

LINE = "═" * 70

def header(step, name):
    print(f"\n{LINE}")
    print(f"  Step {step} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

# ─────────────────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  chacha_stream — ChaCha20 Demo")
print(LINE)
print(f"  Message: {SUNSCREEN.decode()[:60]}...\n")

# ── STEP 1 ───────────────────────────────────────────────────────────────────
header(1, "RFC 8439 §2.4.2 — encrypt from byte 64")
t0      = time.perf_counter()
chacha  = ChaCha20(RFC_KEY, RFC_NONCE, 64)
buf     = chacha.apply_keystream(bytearray(SUNSCREEN))
elapsed = time.perf_counter() - t0
ok("Ciphertext",  bytes(buf).hex()[:48] + "...")
ok("Matches RFC", str(bytes(buf) == SUNSCREEN_CT))
ok("Cursor now",  repr(chacha))
ok("Encrypt",     f"{elapsed*1000:.2f} ms")

chacha.seek(64)
chacha.apply_keystream(buf)
ok("Decrypted",   bytes(buf).decode()[:40] + "...")

# ── STEP 2 ───────────────────────────────────────────────────────────────────
header(2, "SEEK — resume in the middle of the stream")
offset = 42
tail   = crypt(RFC_KEY, RFC_NONCE, SUNSCREEN[offset:], seek=64 + offset)
ok("Seek index",  str(64 + offset))
ok("Tail matches", str(tail == SUNSCREEN_CT[offset:]))

# ── STEP 3 ───────────────────────────────────────────────────────────────────
header(3, "BLOCK — raw keystream for one block")
chacha = ChaCha20.new_from_block(RFC_KEY, RFC_NONCE, 1)
ks     = chacha.get_keystream(1)
ok("Block 1 keystream", ks.hex()[:48] + "...")
ok("Cursor left at",    str(chacha.position))

# ── STEP 4 ───────────────────────────────────────────────────────────────────
header(4, "CROSS-CHECK — cryptography / OpenSSL")
key, nonce = ChaCha20.generate_key(), ChaCha20.generate_nonce()
msg        = os.urandom(129)
ours       = crypt(key, nonce, msg, seek=11)
theirs     = ReferenceChaCha20(key, nonce).crypt(msg, seek=11)
ok("Random key",  key.hex()[:32] + "...")
ok("Identical",   str(ours == theirs))

print(f"\n{LINE}")
print("  DEMO COMPLETE")
print(LINE + "\n")
