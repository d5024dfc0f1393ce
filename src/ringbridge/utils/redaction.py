from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Redactor:
    enabled: bool = True
    _mac_map: dict[str, int] = field(default_factory=dict)
    _mac_counter: int = 0

    def redact_token(self, token: str | None) -> str:
        if token is None:
            return ""
        if not self.enabled:
            return token
        if len(token) <= 8:
            return "x" * len(token)
        return f"{token[:4]}...{token[-4:]}"

    def redact_uuid(self, uuid: str) -> str:
        if not self.enabled:
            return uuid
        parts = uuid.split("-")
        if len(parts) != 5:
            return uuid
        return f"{parts[0]}-xxxx-xxxx-xxxx-xxxxxxxxxxxx"

    def redact_mac(self, mac: str) -> str:
        if not self.enabled:
            return mac
        parts = mac.split(":")
        if len(parts) != 6:
            return mac
        prefix = ":".join(parts[:3])
        counter = self._mac_map.get(mac)
        if counter is None:
            self._mac_counter += 1
            counter = self._mac_counter
            self._mac_map[mac] = counter
        return f"{prefix}:xx:xx:{counter:02d}"
