"""
Built-in tool specs used whenever a remote spec cannot be obtained.

The `logic` strings are JavaScript bodies for `runTool(input, mode)`.
"""
from __future__ import annotations

from forge.intent import IntentName, detect_intent
from forge.spec import Mode, ToolSpec

BASE64_LOGIC = r"""
const value = input.trim();
if (!value) {
  throw new Error('Input cannot be empty.');
}
const encodeUtf8ToBase64 = (text) => {
  if (typeof btoa === 'function') {
    let binary = '';
    for (const byte of new TextEncoder().encode(text)) {
      binary += String.fromCharCode(byte);
    }
    return btoa(binary);
  }
  return Buffer.from(text, 'utf8').toString('base64');
};
const decodeBase64ToUtf8 = (text) => {
  if (typeof atob === 'function') {
    const bytes = Uint8Array.from(atob(text), (char) => char.charCodeAt(0));
    return new TextDecoder('utf-8', { fatal: true }).decode(bytes);
  }
  return Buffer.from(text, 'base64').toString('utf8');
};
if (mode === 'encode') {
  const base64 = encodeUtf8ToBase64(value);
  return base64.replace(/\+/g, '-').replace(/\//g, '_').replace(/=+$/g, '');
}
if (mode === 'decode') {
  const normalized = value.replace(/-/g, '+').replace(/_/g, '/');
  const padding = '='.repeat((4 - (normalized.length % 4)) % 4);
  try {
    return decodeBase64ToUtf8(normalized + padding);
  } catch {
    throw new Error('Input is not valid URL-safe Base64 text.');
  }
}
throw new Error('Unsupported mode.');
""".strip()

TEXT_CLEANUP_LOGIC = r"""
const value = input.trim();
if (!value) {
  throw new Error('Input cannot be empty.');
}
if (mode === 'normalize') {
  return value.replace(/\s+/g, ' ').trim();
}
if (mode === 'sort-lines') {
  return value
    .split(/\r?\n/)
    .map((line) => line.trim())
    .filter(Boolean)
    .sort((a, b) => a.localeCompare(b))
    .join('\n');
}
throw new Error('Unsupported mode.');
""".strip()

BASE64_SPEC = ToolSpec(
    summary="Convert UTF-8 text between Base64 and URL-safe Base64 formats.",
    sample_input="Hello Utility Forge",
    modes=(
        Mode(value="encode", label="Encode URL-safe Base64"),
        Mode(value="decode", label="Decode URL-safe Base64"),
    ),
    logic=BASE64_LOGIC,
)

TEXT_CLEANUP_SPEC = ToolSpec(
    summary="Normalize and sort lines of text for quick developer cleanup tasks.",
    sample_input="zeta\nalpha\nalpha   beta",
    modes=(
        Mode(value="normalize", label="Normalize whitespace"),
        Mode(value="sort-lines", label="Sort lines"),
    ),
    logic=TEXT_CLEANUP_LOGIC,
)


def fallback_spec(name: str, issue_body: str = "") -> ToolSpec:
    """Pick the built-in spec whose family matches the request's intent."""
    if detect_intent(name, issue_body) == IntentName.BASE64:
        return BASE64_SPEC
    return TEXT_CLEANUP_SPEC
