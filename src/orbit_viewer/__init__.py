"""Earth / Moon / satellite circular-orbit viewer."""
