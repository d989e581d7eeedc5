"""
cyfer — Live Demo: banner codec
===============================
Run:  python examples/demo_codec.py

Encodes the documented sample strings, decodes them back and shows
where the round trip stops holding (code + key code above 255).
"""

import sys, os, time
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cyfer        import encode, decode, CyferCipher, InvalidArgument, banner_payload
from cyfer.stages import alphabet

LINE = "═" * 70

def header(stage, name):
    print(f"\n{LINE}")
    print(f"  {stage} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

# ─────────────────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  cyfer — Banner Codec Demo")
print(LINE)

# ── BANNER ───────────────────────────────────────────────────────────────────
header("Route", "GET /")
ok("Payload", banner_payload("hola", "API Working"))

# ── ROUND TRIPS ──────────────────────────────────────────────────────────────
header("Codec", "round trips")
for text, key in [("Hello, World!", "MySecretKey"), ("hola", "API Working"), ("", "")]:
    t0  = time.perf_counter()
    enc = encode(text, key)
    dec = decode(enc, key)
    elapsed = time.perf_counter() - t0
    assert dec == text
    ok(f"{text!r:<16} -> {enc!r:<30}", f"{elapsed*1e6:.1f} µs")

# ── ALPHABET ─────────────────────────────────────────────────────────────────
header("Alphabet", "'O' written as '-'")
raw = b":2;<;888"
ok("Raw nibbles", raw.decode())
ok("Encoded",     alphabet.to_text(raw))

# ── WRONG KEY ────────────────────────────────────────────────────────────────
header("Codec", "wrong key")
c   = CyferCipher("Key1")
enc = c.encrypt("SensitiveData")
ok("Key1 -> Key2", repr(decode(enc, "Key2")))

# ── ENVELOPE ─────────────────────────────────────────────────────────────────
header("Codec", "outside the 0..255 envelope")
enc = encode("\xff", "A")
ok("'\\xff' under 'A'", f"{enc} -> {decode(enc, 'A')!r}")

# ── ERRORS ───────────────────────────────────────────────────────────────────
header("Errors", "empty key")
try:
    encode("hola", "")
except InvalidArgument as e:
    ok("InvalidArgument", str(e))

print(f"\n{LINE}")
print("  All sections: PASSED")
print(f"{LINE}\n")
