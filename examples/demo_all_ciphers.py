"""
classical_cipher — Live Demo: All Three Ciphers
===============================================
Run:  python examples/demo_all_ciphers.py

Sanitizes a message, then encrypts and decrypts it with every cipher,
printing the key material and the threaded Caesar timing.
"""

import sys, os, time
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from classical_cipher.sanitize   import sanitize
from classical_cipher.modes      import CipherMode, CipherType
from classical_cipher.factory    import cipher_factory
from classical_cipher.parallel   import DEFAULT_WORKERS, run_parallel

LINE = "═" * 70
RAW  = "Harvest now, decrypt later — 3 ciphers, 1 tool."

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

# ─────────────────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  classical_cipher — Caesar / Vigenère / Playfair Demo")
print(LINE)
msg = sanitize(RAW)
print(f"  Raw:       {RAW}")
print(f"  Sanitized: {msg}\n")

# ── CAESAR ───────────────────────────────────────────────────────────────────
header("CAESAR — shift 3, threaded")
caesar = cipher_factory(CipherType.CAESAR, "3")
t0 = time.perf_counter()
ct = run_parallel(caesar, msg, CipherMode.ENCRYPT, DEFAULT_WORKERS)
pt = run_parallel(caesar, ct, CipherMode.DECRYPT, DEFAULT_WORKERS)
elapsed = time.perf_counter() - t0
ok("Workers",    DEFAULT_WORKERS)
ok("Encrypted",  ct)
ok("Decrypted",  pt)
ok("Round-trip", f"{elapsed*1000:.2f} ms")

# ── VIGENÈRE ─────────────────────────────────────────────────────────────────
header("VIGENÈRE — keyword LEMON")
vig = cipher_factory(CipherType.VIGENERE, "LEMON")
ct  = vig.transform(msg, CipherMode.ENCRYPT)
ok("Keyword",   vig.keyword)
ok("Encrypted", ct)
ok("Decrypted", vig.transform(ct, CipherMode.DECRYPT))

# ── PLAYFAIR ─────────────────────────────────────────────────────────────────
header("PLAYFAIR — keyword PLAYFAIR EXAMPLE")
pf = cipher_factory(CipherType.PLAYFAIR, "PLAYFAIR EXAMPLE")
for row in pf.rows():
    print("       " + " ".join(row))
ct = pf.transform(msg, CipherMode.ENCRYPT)
ok("Encrypted", ct)
ok("Decrypted", pf.transform(ct, CipherMode.DECRYPT) + "  (fillers retained, digits dropped)")

print(f"\n{LINE}\n")
