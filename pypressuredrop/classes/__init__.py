from .classes import pressure_method, z_method, c_method, ug_method, pb_method, rs_method, bo_method, bw_method, deado_method, liveo_method, ff_method, temp_method, class_dic
