"""Grid storage, transition rules and the World stepping engine."""
