from .rational import exact_fraction, max_fraction_size
from .reduction import cents
from .perception import nearest_interval
from .util import log

class DataFrame:
    def __init__(self, colnames):
        self.column_names = colnames
        self.num_columns = len(colnames)
        self.column_data = {i:[] for i in range(self.num_columns)}

        self.row_data = []
        self.num_rows = 0

    def append(self, data_lst):
        """add a row of data to this dataframe, which we store as objects"""
        assert len(data_lst) == self.num_columns, f"tried to append row of length {len(data_lst)} but dataframe has {self.num_columns} columns"
        row = data_lst
        self.row_data.append(row)
        self.num_rows += 1

        for i, item in enumerate(row):
            self.column_data[i].append(item)

    def __len__(self):
        """DataFrame length is the number of rows"""
        return self.num_rows

    def column_widths(self, up_to_row=None):
        """return the max str size in each column, up to a specified row"""
        widths = []
        for col_num, col in self.column_data.items():
            col_strs = [str(c) for c in col[:up_to_row]]
            str_lens = [len(s) for s in col_strs] + [len(self.column_names[col_num])]
            widths.append(max(str_lens))
        return widths

    def render(self, margin=' ', header_border=True, max_rows=None):
        margin_size = len(margin)
        printed_rows = []
        widths = self.column_widths(up_to_row=max_rows)
        # make header:
        header_row = [f'{self.column_names[i]:{widths[i]}}' for i in range(self.num_columns)]
        printed_rows.append(margin.join(header_row).rstrip())
        if header_border:
            total_width = sum(widths) + (self.num_columns-1)*margin_size
            printed_rows.append('='*total_width)
        # make rows:
        for row in self.row_data[:max_rows]:
            this_row = [f'{str(row[i]):{widths[i]}}' for i in range(self.num_columns)]
            printed_rows.append(margin.join(this_row).rstrip())
        return '\n'.join(printed_rows)

    def show(self, **kwargs):
        print(self.render(**kwargs))


def aligned_fraction(ratio, num_width, den_width):
    """formats the fraction of a ratio with its slash lined up against the others"""
    frac = exact_fraction(ratio)
    return f'{frac.numerator:>{num_width}}/{frac.denominator:<{den_width}}'

def fraction_widths(ratios):
    max_num, max_den = max_fraction_size(ratios)
    return len(str(max_num)), len(str(max_den))

def interval_name(ratio):
    """nearest 12-TET interval and deviation, e.g. '7 +1.96c'"""
    semitones, offset = nearest_interval(ratio)
    return f'{semitones} {offset:+.2f}c'

def scale_table(steps):
    """tabulates a generated scale (a list of GeneratorSteps)"""
    df = DataFrame(['Pos', 'Power', 'Ratio', 'Fraction', 'Cents', '12-TET'])
    num_width, den_width = fraction_widths([s.ratio for s in steps])
    for step in steps:
        df.append([step.position,
                   step.power,
                   f'{step.ratio:.6f}',
                   aligned_fraction(step.ratio, num_width, den_width),
                   f'{cents(step.ratio):.2f}',
                   interval_name(step.ratio)])
    log(f'Tabulated scale of {len(steps)} steps')
    return df

def lattice_table(grid):
    """tabulates a 5-limit lattice (a nested list of LatticeCells), one row per cell"""
    df = DataFrame(['Fifth', 'Third', 'Factor', 'Exp', 'Ratio', 'Fraction', 'Cents'])
    cells = [cell for row in grid for cell in row]
    num_width, den_width = fraction_widths([c.ratio for c in cells])
    for cell in cells:
        df.append([cell.fifth,
                   cell.third,
                   f'{cell.factor:g}',
                   cell.exp,
                   f'{cell.ratio:.6f}',
                   aligned_fraction(cell.ratio, num_width, den_width),
                   f'{cents(cell.ratio):.2f}'])
    return df
