from stopclock.services.analytics import Stats, compute_stats, recent_activity


SAMPLE = [
    {'event_type': 'GAME_STOP', 'metadata': {'time_ms': 3000, 'is_win': True, 'is_official': True},
     'created_at': '2025-11-01T10:00:01+00:00'},
    {'event_type': 'GAME_STOP', 'metadata': {'time_ms': 3100, 'is_win': False, 'is_official': False},
     'created_at': '2025-11-01T10:00:05+00:00'},
    {'event_type': 'RESET', 'metadata': {'cashier': 'Lisa', 'total_attempts': 2},
     'created_at': '2025-11-01T10:00:09+00:00'},
]


def test_compute_stats_literal_sequence():
    stats = compute_stats(SAMPLE)
    assert stats.total_games == 2
    assert stats.official_wins == 1
    assert stats.practice_games == 1
    assert stats.resets == 1
    assert stats.average_time_seconds == 3.05
    assert stats.official_games == 1


def test_compute_stats_is_idempotent_and_order_independent():
    assert compute_stats(SAMPLE) == compute_stats(SAMPLE)
    assert compute_stats(list(reversed(SAMPLE))) == compute_stats(SAMPLE)


def test_empty_history_gives_zeroes():
    stats = compute_stats([])
    assert stats == Stats()
    assert stats.to_dict()['average_time_seconds'] == 0


def test_malformed_metadata_only_skips_that_field():
    events = [
        {'event_type': 'GAME_STOP', 'metadata': None},
        {'event_type': 'GAME_STOP', 'metadata': 'garbage'},
        {'event_type': 'GAME_STOP', 'metadata': {'time_ms': 'fast', 'is_official': True, 'is_win': True}},
        {'event_type': 'GAME_STOP', 'metadata': {'time_ms': 2000, 'is_official': True}},
        {'event_type': 'GAME_START', 'metadata': {'attempt_number': 1}},
        {'event_type': 'VISIT_DASHBOARD'},
        {'metadata': {'time_ms': 9999}},
    ]
    stats = compute_stats(events)
    assert stats.total_games == 4
    assert stats.official_wins == 1
    assert stats.practice_games == 2
    assert stats.average_time_seconds == 2.0
    assert stats.resets == 0


def test_recent_activity_keeps_store_order_and_limits():
    feed = recent_activity(list(reversed(SAMPLE)), limit=2)
    assert [row['event_type'] for row in feed] == ['RESET', 'GAME_STOP']
    assert feed[0]['summary'] == 'Reset by Lisa after 2 attempts'
    assert feed[1]['summary'] == 'Stopped at 3.10s (practice)'


def test_recent_activity_win_summary():
    feed = recent_activity(SAMPLE[:1])
    assert feed[0]['summary'] == 'WIN at 3.00s'
