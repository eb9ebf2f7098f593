from jpeg_common import DHT_MARKER, TableClass
from marker_writers.i_writer import IWriter


class DhtWriter(IWriter):
    def write(self, tables):
        output = bytearray(DHT_MARKER)
        output.append(0)  # Marker size
        output.append(0)

        for table in tables:
            ac_dc_bit = 1 if table.table_class is TableClass.AC else 0
            ht_info = (ac_dc_bit << 4) + table.id
            output.append(ht_info)
            num_symbols_of_length, symbols = table.get_tree().to_code_lengths()

            output.extend(num_symbols_of_length)
            output.extend(symbols)

        real_length = len(output) - 2
        output[2:4] = real_length.to_bytes(2, self._endianess)

        return output

    def __init__(self):
        super(DhtWriter, self).__init__()
