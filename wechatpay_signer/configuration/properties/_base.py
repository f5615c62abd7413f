from pydantic import BaseModel, ConfigDict


class BaseConfig(BaseModel):
    model_config = ConfigDict(
        extra='forbid',
        alias_generator=lambda string: string.replace('_', '-'),
        populate_by_name=True,
        # YAML reads merchant ids and digit-only passwords as integers
        coerce_numbers_to_str=True,
    )
