class IParser:
    def parse(self, data, marker_offset):
        raise NotImplementedError
