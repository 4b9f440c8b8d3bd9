"""TrainFresh: QR-gated local server with a simulated toilet status board."""
