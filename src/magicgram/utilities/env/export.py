from magicgram.utilities.env.parsing import _env_flag, _env_int


class ExportConfiguration:
    @classmethod
    def png_export_max_workers(cls) -> int:
        return _env_int("MAGICGRAM_PNG_EXPORT_MAX_WORKERS", default=1, minimum=1)

    @classmethod
    def png_export_enabled(cls) -> bool:
        return _env_flag("MAGICGRAM_PNG_EXPORT_ENABLED", default=True)
