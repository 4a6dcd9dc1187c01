"""Weekly recommendation cycles, participation streaks and invitations."""
