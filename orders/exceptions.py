class NotFound(Exception):
    """Se lanza cuando el id no corresponde a una fila activa (no borrada)."""

    def __init__(self, model: str, pk):
        self.model = model
        self.pk = pk
        super().__init__(f"{model} not found with id: {pk}")
