import struct, numbers

RM_RNE = 0  # nearest, ties to even
RM_RTZ = 1  # towards zero
RM_RDN = 2  # towards -inf
RM_RUP = 3  # towards +inf
RM_RMM = 4  # nearest, ties to max magnitude (away from zero)

def zext(length, word): return word&((1<<length)-1)
def xfmt(length, word): return f'{{:0{length//4}x}}'.format(zext(length, word))

def shift_right_and_round(s_s, s_sign, shift, rm=RM_RNE):  # -> (s_s, carry)
    if shift <= 0: return s_s<<(-shift), False
    round = s_s&(1 << (shift-1)) != 0
    sticky = s_s&((1 << (shift-1))-1) != 0
    s_s = s_s >> shift
    pre_length = s_s.bit_length()
    s_s += (rm==RM_RNE and (round and (sticky or s_s&1)) or
            rm==RM_RDN and ((round or sticky) and s_sign) or
            rm==RM_RUP and ((round or sticky) and not s_sign) or
            rm==RM_RMM and round)
    return s_s, s_s.bit_length() > pre_length

def f32_raw(f):  # python float -> binary32 bits, rounding to nearest even
    if not isinstance(f, numbers.Real): raise TypeError(f'expected a real number, got {type(f).__name__}')
    try: return struct.unpack('<I', struct.pack('<f', float(f)))[0]
    except OverflowError: return 0xff800000 if f < 0 else 0x7f800000  # finite, but beyond binary32 range
def f32_float(raw): return struct.unpack('<f', struct.pack('<I', zext(32, raw)))[0]
