import pytest

import config


@pytest.fixture(autouse=True)
def log_to_tmp(tmp_path, monkeypatch):
    log_file = tmp_path / "logs" / "full_log.log"
    monkeypatch.setattr(config, "LOG_FILE", str(log_file))
    return log_file


@pytest.fixture
def area_data():
    return {
        "info": {"name": "Plumstead (11)", "region": "City of Cape Town"},
        "events": [
            {"start": "2023-05-10T20:00:00+02:00", "end": "2023-05-10T22:30:00+02:00", "note": "Stage 4"},
            {"start": "2023-05-10T09:15:00+02:00", "end": "2023-05-10T11:00:00+02:00", "note": "Stage 2"},
        ],
        "schedule": {
            "days": [
                {
                    "date": "2023-05-10",
                    "name": "Wednesday",
                    "stages": [
                        ["08:00-10:30"],
                        ["08:00-11:00", "16:00-18:30"],
                        ["00:00-02:30", "08:00-11:00", "16:00-18:30"],
                        ["00:00-02:30", "08:00-11:00", "16:00-18:30", "20:00-22:30"],
                    ],
                },
                {
                    "date": "2023-05-11",
                    "name": "Thursday",
                    "stages": [
                        ["23:00-01:30"],
                        ["06:00-08:30", "23:00-01:30"],
                    ],
                },
            ],
            "source": "https://loadshedding.eskom.co.za/",
        },
    }
