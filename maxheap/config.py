import json


def _is_config_field(s: str):
    return s.isupper() and not s.startswith("_")


class BaseConfig:
    def to_dict(self):
        ret = dict()
        for k, v in self.__class__.__dict__.items():
            if _is_config_field(k):
                ret[k] = getattr(self, k) if k in self.__dict__ else v
        return ret

    @classmethod
    def from_dict(cls, d):
        config = cls()
        for k, v in d.items():
            setattr(config, k, v)
        return config

    def to_json(self):
        return json.dumps(self.to_dict(), indent=4)

    @classmethod
    def from_json(cls, j):
        return cls.from_dict(json.loads(j))

    def __eq__(self, other):
        if not isinstance(other, BaseConfig):
            return NotImplemented
        return self.to_dict() == other.to_dict()


class HeapConfig(BaseConfig):
    # verify the heap property after every mutating operation, O(n) each time
    CHECK_INTEGRITY = False
    LOG_LEVEL = "warning"

