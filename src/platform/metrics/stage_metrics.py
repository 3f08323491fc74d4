from prometheus_client import Counter, Gauge


class StageMetrics:
    """
    Stage Broadcast Core Metrics Collector

    Tracks host commands, viewer fan-out health and the scripted show flow
    during a live session.
    """

    def __init__(self):
        # ========== Control Surface Metrics ==========
        self.actions_applied = Counter(
            'stage_actions_applied_total',
            'Total actions applied to the session state',
            ['action_type'],
        )

        # ========== Viewer Fan-out Metrics ==========
        self.viewers_connected = Gauge(
            'stage_viewers_connected',
            'Viewer channels currently registered',
        )

        self.broadcast_deliveries = Counter(
            'stage_broadcast_deliveries_total',
            'Events written to viewer channels',
            ['event'],
        )

        self.broadcast_failures = Counter(
            'stage_broadcast_failures_total',
            'Events that could not be written to a viewer channel',
            ['event', 'reason'],  # reason: buffer_full/closed
        )

        # ========== Show Flow Metrics ==========
        self.timeline_steps_fired = Counter(
            'stage_timeline_steps_fired_total',
            'Scripted show steps executed',
        )

        # ========== Journey Log Metrics ==========
        self.journey_submissions = Counter(
            'stage_journey_submissions_total',
            'Journey submissions received',
            ['result'],  # result: stored/failed
        )

    # ========== Helper Methods ==========

    def record_action(self, *, action_type: str):
        self.actions_applied.labels(action_type=action_type).inc()

    def record_broadcast(self, *, event: str, delivered: int, failures: dict[str, int]):
        if delivered:
            self.broadcast_deliveries.labels(event=event).inc(delivered)
        for reason, count in failures.items():
            if count:
                self.broadcast_failures.labels(event=event, reason=reason).inc(count)

    def set_viewer_count(self, *, count: int):
        self.viewers_connected.set(count)

    def record_timeline_step(self):
        self.timeline_steps_fired.inc()

    def record_journey_submission(self, *, stored: bool):
        self.journey_submissions.labels(result='stored' if stored else 'failed').inc()


# Global metrics instance
metrics = StageMetrics()
