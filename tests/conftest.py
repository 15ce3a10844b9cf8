from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
for entry in (ROOT, ROOT / "src"):
    if str(entry) not in sys.path:
        sys.path.insert(0, str(entry))

import pytest

SERVICE_UNIT = """[Unit]
Description=My Test Service
Documentation=https://example.com/docs
After=network.target
Wants=network-online.target

[Service]
Type=simple
ExecStart=/usr/bin/my-service --config=/etc/my-service/config.conf
ExecStop=/usr/bin/my-service --stop
Restart=on-failure
RestartSec=5
User=nobody
Group=nogroup
WorkingDirectory=/var/lib/my-service

[Install]
WantedBy=multi-user.target
"""


@pytest.fixture
def service_unit() -> str:
    return SERVICE_UNIT
